"""Color model, colorings, supersampling and image export."""
