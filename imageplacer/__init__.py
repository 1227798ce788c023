"""ImagePlacer — drop web-collected images into design-document frames."""
