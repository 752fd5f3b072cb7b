"""
partscan - Part number and gear ratio scanner for engine schematics.

Modules:
    row: Row buffer and number extractor
    symbols: Symbol classification
    gears: Gear records and registry
    scanner: Two-row sliding window scanner
    config: YAML scanner configuration
    stats: Scan statistics
    errors: Error types
"""

from partscan.errors import ConfigError, GearOverflowError, NumberParseError, SchematicError
from partscan.scanner import ScanResult, SchematicScanner, scan_file, scan_lines

__all__ = [
    'ConfigError',
    'GearOverflowError',
    'NumberParseError',
    'SchematicError',
    'ScanResult',
    'SchematicScanner',
    'scan_file',
    'scan_lines',
]
