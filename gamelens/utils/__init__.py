"""
Utility modules for GameLens.

Collaborators at the edges of the analysis:
- Loader: CSV file -> GameRecord list
- Plotting: coordinate pairs -> scatter plot image
"""
