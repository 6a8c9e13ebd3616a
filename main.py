#!/usr/bin/env python3
"""
duelsim - turn-based two-fighter battle simulator

Thin wrapper around :func:`duelsim.cli.run`. The battle rules live in the
duelsim.battle package:
- archetype attack policies
- clamped-health combatants
- the alternating-turn engine

To run: python main.py --name1 Ana --class1 Heavy --name2 Ben --class2 Precise
"""
import sys

from duelsim.cli import run

if __name__ == "__main__":
    sys.exit(run())
