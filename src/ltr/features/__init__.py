"""Feature packages for the segmentation and aggregation pipeline."""
