from .compile import handle_compile
from .forms import handle_forms
