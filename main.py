#!/usr/bin/env python3
"""
Main entry point for feed-auth
"""

from feed_auth.main import run

if __name__ == "__main__":
    run()
