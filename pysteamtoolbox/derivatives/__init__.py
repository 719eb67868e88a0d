from .derivatives import partial_derivative_pt, partial_derivative_rhot
