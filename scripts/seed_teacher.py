import argparse
from pathlib import Path
import sys

from sqlalchemy import select

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from classboard.core.config import get_settings
from classboard.core.security import hash_password
from classboard.db.session import Database
from classboard.models.teacher import Teacher


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Create a teacher account or reset its password.")
    parser.add_argument("--email", default=settings.bootstrap_teacher_email)
    parser.add_argument("--password", default=settings.bootstrap_teacher_password)
    parser.add_argument("--full-name", default=settings.bootstrap_teacher_name)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    email = args.email.lower()
    database = Database()
    try:
        with database.session() as db:
            teacher = db.scalar(select(Teacher).where(Teacher.email == email))
            if teacher:
                teacher.password_hash = hash_password(args.password)
                action = "password reset"
            else:
                teacher = Teacher(email=email, full_name=args.full_name, password_hash=hash_password(args.password))
                action = "created"
            db.add(teacher)
            db.commit()
    finally:
        database.dispose()
    print(f"Teacher {email} {action}.")


if __name__ == "__main__":
    main()
