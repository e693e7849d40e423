"""Optimal solver for 4×5 sliding-block (Klotski) puzzles."""
