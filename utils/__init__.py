# Shared helpers
