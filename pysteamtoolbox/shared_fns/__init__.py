from .shared_fns import MAX_ITER, convert_to_numpy, process_output, apply_elementwise, bounded_root
