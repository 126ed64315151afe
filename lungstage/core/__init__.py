"""
Core staging pipeline: clinical rules, questionnaire navigation, reports.
"""
