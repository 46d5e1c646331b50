"""
Gameplay core: grid, entities, movement rules, pursuit and the simulation step.
NO UI DEPENDENCIES.
"""
