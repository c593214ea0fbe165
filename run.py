#!/usr/bin/env python
"""
Workout metrics CLI runner.

Usage:
    python run.py demo                       # analyze the built-in sample plan
    python run.py analyze [plan.json]        # plan summary and recommendations
    python run.py batch workouts.json        # totals for a batch of workouts
    python run.py compare workouts.json A B  # compare two workouts by volume
"""

import sys
from pathlib import Path

# add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from workout_metrics.main import main

if __name__ == "__main__":
    main()
