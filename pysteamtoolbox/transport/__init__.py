from .transport import (dynamic_viscosity_rhot, thermal_conductivity_rhot, dielectric_constant_rhot,
                        refractive_index_rhot, surface_tension_t, kinematic_viscosity, thermal_diffusivity,
                        prandtl_number, WAVELENGTH_DEFAULT)
