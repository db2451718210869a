"""
Command-line interface (`subnet-quiz`).
"""
