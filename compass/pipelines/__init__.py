"""
pipelines/ - ingestion and per-record derivation

Modules:
    csv_parser.py   - Delimited text -> ordered header/value rows
    normalizer.py   - Typed numerics and batch bounds
    keywords.py     - Theme keyword lists
    classifier.py   - Theme tagging
    status.py       - Acquisition / closure labels
    exporters.py    - Analysis CSV export
    utils.py        - Lenient number and date parsing
"""
