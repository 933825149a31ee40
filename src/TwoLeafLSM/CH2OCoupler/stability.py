# -*- coding: utf-8 -*-

"""
Coupled photosynthesis, stomatal conductance and leaf energy balance,
solved by iteration on the leaf temperature until the new leaf
temperature predicted by the energy balance is stable.

Photosynthesis depends on the CO2 concentration and on the vapour
pressure deficit at the leaf surface, which themselves depend on the
assimilation and transpiration rates given by the energy balance. The
leaf temperature couples both and changes slowly from one iteration to
the next, so a fixed-point iteration on it resolves the loop.

This file is part of the TwoLeafLSM model.

Please refer to the terms of the MIT License, which you should have
received along with the TwoLeafLSM.

References:
----------
* Leuning et al. (1995). Leaf nitrogen, photosynthesis, conductance and
  transpiration: scaling from leaves to canopies. Plant, Cell &
  Environment, 18(10), 1183-1200.
* Wang, Y. P., & Leuning, R. (1998). A two-leaf model for canopy
  conductance, photosynthesis and partitioning of available energy I.
  Agricultural and Forest Meteorology, 91(1-2), 89-111.

"""

__title__ = "Leaf temperature stability loop"
__author__ = "TwoLeafLSM developers"
__version__ = "1.0 (14.10.2026)"


# ======================================================================

# general modules
import collections  # named tuples
import enum  # tagged exit reasons
import logging

# own modules
from TwoLeafLSM import conv  # unit converter
from TwoLeafLSM.SPAC import leaf_energy_balance, photosynthesis_C3

logger = logging.getLogger(__name__)


# ======================================================================

class ExitReason(enum.Enum):

    CONVERGED = 'converged'
    NON_POSITIVE_ASSIMILATION = 'non-positive assimilation'
    MAX_ITERATIONS_EXCEEDED = 'max iterations exceeded'


class PhotosynthesisPathwayError(NotImplementedError):

    """Raised when a photosynthetic pathway other than C3 is selected."""


class NonConvergenceError(RuntimeError):

    """
    Raised when the leaf temperature has not converged within the
    maximum number of iterations. The solution reached at the cap is
    kept in the solution attribute.

    """

    def __init__(self, msg, solution):

        super(NonConvergenceError, self).__init__(msg)
        self.solution = solution


LeafSolution = collections.namedtuple('LeafSolution',
                                      ['An', 'gsc', 'trans', 'Tleaf', 'Cs',
                                       'dleaf', 'apar', 'rnet', 'exit',
                                       'iterations', 'Tleaf_iterates'])


class LeafState(object):

    """
    Leaf surface conditions and fluxes of one leaf class, initialised
    from the air space values and updated in place at each iteration.

    """

    def __init__(self, p, apar):

        self.Tleaf = p.Tair  # degC
        self.dleaf = p.VPD * conv.kPa_2_Pa  # Pa
        self.Cs = p.CO2  # umol mol-1
        self.apar = apar  # umol m-2 s-1
        self.gsc = 0.  # mol m-2 s-1
        self.An = 0.  # umol m-2 s-1
        self.trans = 0.  # mol m-2 s-1
        self.rnet = 0.  # W m-2
        self.Tleaf_iterates = [self.Tleaf]

    def solution(self, exit_reason, iterations):

        return LeafSolution(self.An, self.gsc, self.trans, self.Tleaf,
                            self.Cs, self.dleaf, self.apar, self.rnet,
                            exit_reason, iterations,
                            tuple(self.Tleaf_iterates))


def check_pathway(ps_pathway):

    """
    Only the C3 photosynthetic pathway is implemented, anything else
    aborts the run.

    Arguments:
    ----------
    ps_pathway: string
        photosynthetic pathway, 'C3' or 'C4'

    """

    if ps_pathway == 'C3':

        return

    if ps_pathway == 'C4':
        logger.error('C4 photosynthesis not implemented')

        raise PhotosynthesisPathwayError('C4 photosynthesis not implemented')

    raise ValueError('unknown photosynthetic pathway: %s' % (ps_pathway, ))


def solve_leaf(p, ncontent, apar, photosynthesis=photosynthesis_C3,
               ps_pathway='C3', threshold_conv=0.02, iter_max=100,
               name='leaf'):

    """
    Checks the energy balance by looking for convergence of the new leaf
    temperature with the leaf temperature of the previous iteration.
    Then returns the corresponding An, gs, E, etc.

    Arguments:
    ----------
    p: pandas series
        time step's met data & params

    ncontent: float
        nitrogen content of the leaf class [g N m-2]

    apar: float
        PAR absorbed by the leaf class [umol m-2 s-1]

    photosynthesis: callable
        photosynthesis model, called as photosynthesis(p, ncontent,
        Tleaf, apar, Cs, dleaf) and returning (gsc, An)

    ps_pathway: string
        photosynthetic pathway, only 'C3' is implemented

    threshold_conv: float
        convergence threshold for the new leaf temperature to be in
        energy balance [degC]

    iter_max: int
        maximum number of iterations allowed on the leaf temperature
        before reaching the conclusion that the system is not energy
        balanced

    name: string
        leaf class, only used in the log messages

    Returns:
    --------
    A LeafSolution holding the net assimilation rate [umol m-2 s-1], the
    stomatal conductance to CO2 [mol m-2 s-1], the transpiration rate
    [mol m-2 s-1], the leaf temperature [degC], the leaf surface CO2
    [umol mol-1] and VPD [Pa], the absorbed PAR [umol m-2 s-1], the
    isothermal net radiation [W m-2], the exit reason, the number of
    iterations, and all the leaf temperature iterates [degC].

    """

    check_pathway(ps_pathway)

    leaf = LeafState(p, apar)
    exit_reason = ExitReason.MAX_ITERATIONS_EXCEEDED
    n_iter = 0

    while n_iter < iter_max:

        n_iter += 1
        leaf.gsc, leaf.An = photosynthesis(p, ncontent, leaf.Tleaf, apar,
                                           leaf.Cs, leaf.dleaf)

        if leaf.An <= 0.:  # no further refinement is meaningful
            leaf.trans = 0.
            exit_reason = ExitReason.NON_POSITIVE_ASSIMILATION
            break

        # new Cs, dleaf, Tleaf
        leaf.Cs, leaf.dleaf, new_Tleaf, leaf.trans, leaf.rnet, __, __ = \
            leaf_energy_balance(p, leaf.Tleaf, leaf.gsc, leaf.An, apar)
        leaf.Tleaf_iterates.append(new_Tleaf)

        logger.debug('%s iteration %d: Tleaf = %.4f, new Tleaf = %.4f, '
                     'An = %.4f, gsc = %.4f', name, n_iter, leaf.Tleaf,
                     new_Tleaf, leaf.An, leaf.gsc)

        if abs(leaf.Tleaf - new_Tleaf) < threshold_conv:
            exit_reason = ExitReason.CONVERGED
            break

        leaf.Tleaf = new_Tleaf  # no convergence, iterate

    solution = leaf.solution(exit_reason, n_iter)

    if exit_reason is ExitReason.MAX_ITERATIONS_EXCEEDED:
        logger.error('No convergence in canopy loop: %s leaf after %d '
                     'iterations, Tleaf = %.4f', name, n_iter, leaf.Tleaf)

        raise NonConvergenceError('No convergence in canopy loop (%s leaf '
                                  'after %d iterations)' % (name, n_iter),
                                  solution)

    return solution
