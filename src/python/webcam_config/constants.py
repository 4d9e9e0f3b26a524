"""Constants for DirectShow webcam control."""

# Control group tags
CAMERA_CONTROL_TAG = "CameraControl"
VIDEO_PROC_AMP_TAG = "VideoProcAmp"

# Property ids are probed from 0 up to and including this value
MAX_PROPERTY_ID = 20

# Flag bits shared by CameraControlFlags and VideoProcAmpFlags
FLAGS_AUTO = 0x1
FLAGS_MANUAL = 0x2

CAMERA_CONTROL_NAMES = (
    "Pan",
    "Tilt",
    "Roll",
    "Zoom",
    "Exposure",
    "Iris",
    "Focus",
    "CamControl 7",
    "CamControl 8",
    "CamControl 9",
    "CamControl 10",
    "CamControl 11",
    "CamControl 12",
    "CamControl 13",
    "CamControl 14",
    "CamControl 15",
    "CamControl 16",
    "CamControl 17",
    "CamControl 18",
    "LowLightCompensation",
)

VIDEO_PROC_AMP_NAMES = (
    "Brightness",
    "Contrast",
    "Hue",
    "Saturation",
    "Sharpness",
    "Gamma",
    "ColorEnable",
    "WhiteBalance",
    "BacklightCompensation",
    "Gain",
    "VideoProcAmp 10",
    "VideoProcAmp 11",
    "VideoProcAmp 12",
    "PowerLineFrequency",
)

# DirectShow GUIDs
CLSID_SYSTEM_DEVICE_ENUM = "{62BE5D10-60EB-11D0-BD3B-00A0C911CE86}"
CLSID_VIDEO_INPUT_DEVICE_CATEGORY = "{860BB310-5D01-11D0-BD3B-00A0C911CE86}"
IID_ICREATE_DEV_ENUM = "{29840822-5B84-11D0-BD3B-00A0C911CE86}"
IID_IBASE_FILTER = "{56A86895-0AD4-11CE-B03A-0020AF0BA770}"
IID_IPROPERTY_BAG = "{55272A00-42CB-11CE-8135-00AA004BB851}"
IID_IAM_CAMERA_CONTROL = "{C6E13370-30AC-11D0-A18C-00A0C9118956}"
IID_IAM_VIDEO_PROC_AMP = "{C6E13360-30AC-11D0-A18C-00A0C9118956}"

# Config file
DEFAULT_CONFIG_FILENAME = ".webcam_config"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"
