"""HTTP surface for the devutils tools."""
