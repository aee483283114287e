from toboggan_pathfinder.app import run

run()
