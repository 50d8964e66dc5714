"""
Test suite for MedIntelli Clínica.

API tests run against a SQLite database and an in-memory redis fake.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
