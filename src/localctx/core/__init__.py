"""Application core: state, settings, command dispatch."""
