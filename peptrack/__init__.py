"""PepTrack dose reminder service."""
