"""Application layer orchestrating features for the user interfaces."""
