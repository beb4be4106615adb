# Path: predmatch/process/matcher/engine/__init__.py
"""
Matcher Engine Core

Core components of the matcher:
- SpecParser: Parses raw specification trees into spec nodes
- Path resolver: Pulls sub-values out of the value under test
- Evaluator: Recursive, first-failure evaluation
- Matcher: Result facade (passes / fails / ensure / determine)
"""

from .spec_parser import SpecParser
from .path_resolver import get_segment, resolve, iter_keys
from .evaluator import Evaluator
from .matcher import Matcher

__all__ = [
    'SpecParser',
    'get_segment',
    'resolve',
    'iter_keys',
    'Evaluator',
    'Matcher',
]
