import os
from datetime import datetime


def get_target_run_folder(application_name: str, base_dir: str = "./runs") -> str:
    """Create and return <base_dir>/<application_name>/<YYYYmmdd_HHMMSS>."""
    run_folder = os.path.join(
        base_dir, application_name, datetime.now().strftime('%Y%m%d_%H%M%S')
    )
    os.makedirs(run_folder, exist_ok=True)
    return run_folder
