"""Path primitives for K-shortest-path searches.

- ``Path`` models a single hop sequence with a derived aggregate cost.
- ``PathCollection`` is the ordered, duplicate-free container used for both
  confirmed paths and pending candidates.
"""
