from .selector import select_region_pt, select_region_rhot, select_region_ph, select_region_ps, select_region_hs
