"""
scoring/ - ESG Scoring Engine

Modules:
    constants.py                - Emission factors, benchmarks, weight sets (ScoringConfig)
    utils.py                    - Normalization primitives, clamping, rounding
    environmental_calculator.py - Emissions + environmental pillar score
    social_calculator.py        - Social pillar score
    governance_calculator.py    - Governance pillar score
    esg_calculator.py           - Composite ESG score (compute_scores)
    validation.py               - Required section/field schema
"""
