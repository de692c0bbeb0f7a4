"""Infrastructure adapters: MongoDB persistence and outbound HTTP clients."""
