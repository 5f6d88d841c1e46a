"""Link shortener: maps URLs to short hashes and back."""
