"""
ThoughtDiary - Automatic Thoughts Journal

A self-hosted CBT/REBT diary for recording situations, emotions,
automatic thoughts and the distortions behind them.

The journal is for noticing patterns, not for judging them.
"""

__version__ = "0.1.0"
