"""
Data models for GameLens.

- GameRecord: one row of the games dataset
- CategoryStat: ranked per-category summary
- CategoricalField / NumericField: column selectors
"""
