import sys

from sqlmodel import Session

from finance_dashboard.database import create_db_and_tables, engine
from finance_dashboard.models.user import User

DEV_USERS = [
    {"user_id": 1, "name": "Alice"},
    {"user_id": 2, "name": "Bob"},
]

def seed_users(users=DEV_USERS):
    create_db_and_tables()
    with Session(engine) as session:
        for data in users:
            if session.get(User, data["user_id"]):
                continue
            session.add(User(**data))
            print(f"✅ Created user {data['user_id']} ({data['name']})")
        session.commit()
    print("🎉 Seeding finished.")

if __name__ == "__main__":
    # Optional args: "<id>:<name>" pairs
    args = [a.split(":", 1) for a in sys.argv[1:]]
    if args:
        seed_users([{"user_id": int(i), "name": n} for i, n in args])
    else:
        seed_users()
