# config.py
SLOPE_MARKER = "."
TREE_MARKER = "#"

# (down, right) per step
FIRST_SLOPE = (1, 3)
SURVEY_SLOPES = ((1, 1), (1, 3), (1, 5), (1, 7), (2, 1))

USAGE_MESSAGE = "input filename is required"
FIRST_RESULT_FMT = "You encounter {} trees"
PRODUCT_RESULT_FMT = "The product of encountered trees is {}"
