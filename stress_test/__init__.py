"""HTTP stress testing tool."""
