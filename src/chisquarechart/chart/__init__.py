"""
The CHART layer turns engine results into pictures.
It depends on matplotlib but not on Qt, so charts can be exported headless.
"""
