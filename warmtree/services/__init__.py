"""Services for warmtree."""
