"""Default endpoints and display constants for the CWA forecast feed."""

CWA_BASE_URL = "https://opendata.cwa.gov.tw"
CWA_DATASET_ID = "F-C0032-001"  # 36-hour county/city forecast
DEFAULT_USER_AGENT = "weatherboard/0.1.0"

API_KEY_ENV_VAR = "CWA_API_KEY"
DEFAULT_CONFIG = "configs/default.yaml"
