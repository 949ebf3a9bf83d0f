"""Seeding, round-robin scheduling and double elimination brackets."""
