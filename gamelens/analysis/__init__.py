"""
Analysis core for GameLens.

Contains the pure computation modules:
- Statistics primitives (mean, median, Pearson correlation)
- Categorical aggregation and ranking
- Report text formatting
"""
