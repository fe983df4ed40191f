"""Photo Album API — albums, photos, likes, comments and replies."""
