#!/usr/bin/env python3
"""Mint a development bearer token for an operator id"""
import sys
import os
import argparse
from datetime import timedelta

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.security import create_access_token


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("operator_id", help="Operator id, as the identity provider would put in `sub`")
    parser.add_argument("--email", default=None)
    parser.add_argument("--minutes", type=int, default=None, help="Lifetime (default ACCESS_TOKEN_EXPIRE_MINUTES)")
    args = parser.parse_args()

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    token = create_access_token(args.operator_id, email=args.email, expires_delta=expires)
    print(token)


if __name__ == "__main__":
    main()
