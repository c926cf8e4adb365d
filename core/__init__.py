"""
Core Layer
- Purpose: Encapsulate the exercise classification engine and its domain models
- Key Directories:
    - entities
    - interface
    - service
    - usecase
"""

from .entities import *
from .exceptions import *
from .interface import *
