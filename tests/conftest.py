import os
import sys

# Make the top-level modules importable without installing the project
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
