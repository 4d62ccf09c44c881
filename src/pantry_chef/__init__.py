"""
Pantry Chef - pantry tracker with an AI recipe generator.

Packages:
- recipes: recipe-generation contract (prompt, parser, generator)
- web: FastAPI app serving the generate-recipes endpoint
- db: Supabase row store for pantry items and saved recipes
- session: explicit auth context
- views: view state for the pantry, generator and saved recipes
"""

__version__ = "1.0.0"
