from typing import Dict, Any


JSON = Dict[str, Any]
