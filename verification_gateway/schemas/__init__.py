# Schemas package (re-export feature modules for stable imports)
from .verification.verification import *
from .pricing.pricing import *
from .common import *
