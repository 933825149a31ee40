from .stability import ExitReason, LeafState, LeafSolution
from .stability import PhotosynthesisPathwayError, NonConvergenceError
from .stability import check_pathway, solve_leaf
