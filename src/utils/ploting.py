import matplotlib.pyplot as plt
import numpy as np
from typing import Mapping, Union

from quadrature.convergence import ConvergenceTable


class ConvergencePlotter:
    """
    Log-log plots of convergence studies: error against the number of
    sub-intervals, and error against the number of integrand evaluations.

    Parameters
    ----------
    tables : ConvergenceTable or Mapping[str, ConvergenceTable]
        One study, or several keyed by label (as returned by
        ``ConvergenceStudy.compare``).
    """

    def __init__(self, tables: Union[ConvergenceTable, Mapping[str, ConvergenceTable]]):
        if isinstance(tables, ConvergenceTable):
            tables = {tables.rule_name: tables}
        self.tables = dict(tables)

    @staticmethod
    def _positive(errors: np.ndarray) -> np.ndarray:
        # log axes cannot show exact zeros
        return np.where(errors > 0, errors, np.nan)

    def __plot_error__(self, ax):
        """Error vs n."""
        for label, table in self.tables.items():
            ax.loglog(table.n, self._positive(table.errors), marker='o',
                      label=label, linewidth=2)
        ax.set_xlabel('Sub-intervals n', fontsize=11)
        ax.set_ylabel('|estimate - reference|', fontsize=11)
        ax.set_title('Error vs subdivisions', fontsize=12, fontweight='bold')
        ax.legend(fontsize=10)
        ax.grid(True, which='both', alpha=0.3)

    def __plot_cost__(self, ax):
        """Error vs integrand evaluations."""
        for label, table in self.tables.items():
            ax.loglog(table.evaluations, self._positive(table.errors), marker='s',
                      label=label, linewidth=2)
        ax.set_xlabel('Integrand evaluations', fontsize=11)
        ax.set_ylabel('|estimate - reference|', fontsize=11)
        ax.set_title('Error vs cost', fontsize=12, fontweight='bold')
        ax.legend(fontsize=10)
        ax.grid(True, which='both', alpha=0.3)

    def plot(self, which='all', figsize=None):
        """
        Main plotting method.

        Parameters
        ----------
        which : str
            What to plot: 'error', 'cost', or 'all' (default: 'all')
        figsize : tuple, optional
            Figure size. If None, a size suited to ``which`` is used.

        Returns
        -------
        fig, ax
            ``ax`` is a pair of axes for 'all'.
        """
        figsize_map = {
            'error': (8, 6),
            'cost': (8, 6),
            'all': (14, 6),
        }
        if which not in figsize_map:
            raise ValueError(f"Option '{which}' is not valid. Use 'error', 'cost', or 'all'")
        if figsize is None:
            figsize = figsize_map[which]

        if which == 'all':
            fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)
            self.__plot_error__(ax1)
            self.__plot_cost__(ax2)
            plt.tight_layout()
            return fig, (ax1, ax2)

        fig, ax = plt.subplots(figsize=figsize)
        if which == 'error':
            self.__plot_error__(ax)
        else:
            self.__plot_cost__(ax)
        plt.tight_layout()
        return fig, ax
