from .channels import *
from .guilds import *
from .invites import *
from .users import *
