#!/usr/bin/env python3
"""Generate bcrypt password hash for seeding a user document."""
import sys

from tasker_service.services.password import hash_password

if len(sys.argv) < 2:
    print("Usage: python generate_password_hash.py <password>")
    sys.exit(1)

print(hash_password(sys.argv[1]))
