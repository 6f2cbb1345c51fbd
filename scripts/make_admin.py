"""Create an admin account, or reset the password of an existing one.

Usage: python scripts/make_admin.py USERNAME EMAIL PASSWORD
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blog import create_app
from blog.extensions import db
from blog.services import store
from blog.services.security import hash_password


def make_admin(app, username, email, password):
    """Returns True when a new user was created."""
    with app.app_context():
        password_hash = hash_password(password, method=app.config['PASSWORD_HASH_METHOD'])
        user = store.get_user(username)
        if user is None:
            store.save_user(username, email, password_hash)
            return True
        user.email = email
        user.password_hash = password_hash
        db.session.commit()
        return False


if __name__ == '__main__':
    if len(sys.argv) != 4:
        print(__doc__)
        sys.exit(1)

    created = make_admin(create_app(), *sys.argv[1:])
    print("New admin user created" if created else "Existing admin password reset")
