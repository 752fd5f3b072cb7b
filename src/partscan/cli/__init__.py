"""
Command-line interface entry points for partscan.

Entry points:
- partscan: Scan a schematic file and print the part sum and gear ratio sum
"""
