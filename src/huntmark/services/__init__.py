"""Services built on the markup core."""
