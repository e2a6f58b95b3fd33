# Schemas package (re-export feature modules for stable imports)
from .auth.auth import *
from .doctors.doctor import *
from .common.common import *
