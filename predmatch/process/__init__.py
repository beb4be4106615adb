# Path: predmatch/process/__init__.py
"""
Process Layer for predmatch

The PROCESS layer holds the matching engine:
- matcher/ - specification parsing, path resolution, evaluation

Components follow the IPO pattern:
- Read the specification (INPUT: spec parser)
- Evaluate values against it (PROCESS: resolver, evaluator)
- Shape the result for the caller (OUTPUT: matcher facade)
"""

from predmatch.process.matcher import Matcher

__all__ = [
    'Matcher',
]
