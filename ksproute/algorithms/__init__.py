"""Path-search algorithms: the SPF primitive, Yen's KSP and its batch runner."""
