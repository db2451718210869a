"""
Subnet Quiz - randomized IPv4 subnetting practice.

Packages:
- core: IPv4 values and subnet arithmetic
- generation: distractor builder, question archetypes, question sets
- quiz: question records and the quiz session state machine
- delivery: rich rendering helpers
- cli: the `subnet-quiz` typer application
"""

__version__ = "1.0.0"
