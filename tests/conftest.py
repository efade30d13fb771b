import os
import sys

# the codec modules import each other by bare name
HUFF_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "HUFF"))
if HUFF_DIR not in sys.path:
	sys.path.insert(0, HUFF_DIR)
