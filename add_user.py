"""Seed the user that the task client writes as (DEFAULT_USER_ID)."""
import sys

from task_service.database import create_tables, get_session
from task_service.models import User

name = sys.argv[1] if len(sys.argv) > 1 else "default"

# Create tables if not exist
create_tables()

with get_session() as db:
    # Check if user already exists
    existing_user = db.query(User).filter(User.name == name).first()
    if existing_user:
        print(f"User already exists: {existing_user.name} (id={existing_user.id})")
    else:
        user = User(name=name)
        db.add(user)
        db.commit()
        db.refresh(user)
        print(f"User created: {user.name} (id={user.id})")
