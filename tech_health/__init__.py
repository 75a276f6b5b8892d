"""
Tech Health Assessment

Self-assessment scoring for engineering teams: five areas of sub-axes rated
1 to 4, a pulse survey, and a scorer that turns a (possibly partial)
response into area averages, a maturity level, a speed/sustainability
compass and ranked recommendations.
"""

__version__ = "1.0.0"
