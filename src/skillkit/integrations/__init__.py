"""External-world integrations behind ABCs.

Each integration has abc.py (interface), real.py (production) and fake.py
(in-memory implementation for tests).
"""
