"""gridroute — shortest paths over small directed grids."""
