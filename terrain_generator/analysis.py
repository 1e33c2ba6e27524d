# terrain_generator/analysis.py

"""
Summary statistics for a generated height grid, used for logging and for
sanity checks on the accretion output.
"""

import numpy as np
from scipy.ndimage import label


def terrain_statistics(height_grid: np.ndarray, margin_width: int = None, floor: int = 0) -> dict:
    """
    Measures the raised terrain, i.e. cells with a height above `floor`.

    Returns:
        dict: covered_cells, coverage_fraction, max_height, mean_height,
        blob_count (4-connected components of raised cells) and, when
        margin_width is given, interior_fraction (share of raised cells whose
        center lies inside the safe interior).
    """
    raised = height_grid > floor
    covered = int(np.count_nonzero(raised))
    _, blob_count = label(raised)

    stats = {
        'covered_cells': covered,
        'coverage_fraction': covered / height_grid.size,
        'max_height': int(height_grid.max()) if height_grid.size else 0,
        'mean_height': float(height_grid.mean()) if height_grid.size else 0.0,
        'blob_count': int(blob_count),
    }

    if margin_width is not None:
        width, height = height_grid.shape
        interior = np.zeros_like(raised)
        interior[margin_width:width - margin_width, margin_width:height - margin_width] = True
        inside = int(np.count_nonzero(raised & interior))
        stats['interior_fraction'] = inside / covered if covered else 0.0

    return stats
