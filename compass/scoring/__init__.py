"""
scoring/ - Company Scoring Engine

Modules:
    utils.py              - normalize / clamp / mean / Decimal rounding
    stage_calculator.py   - Funding-stage maturity lookup
    company_scorer.py     - Funding, operations, brand/trend, potential, comprehensive
"""
