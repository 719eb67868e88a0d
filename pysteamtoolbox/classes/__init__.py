from .classes import quantity, quantity_info, derivative_quantities, class_dic, validate_quantity
