"""Infrastructure layer: HTTP clients for Azure Cognitive Services."""
