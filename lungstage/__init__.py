"""
Respiratory staging service: COPD (GOLD grade / ABE group) and asthma
severity questionnaires.
"""
__version__ = "1.0.0"
