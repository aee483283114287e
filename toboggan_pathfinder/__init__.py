# toboggan_pathfinder — count trees hit on a wrapping terrain grid
