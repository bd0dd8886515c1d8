"""Well-known entry names in a virtual machine's .vmx configuration file."""

CONFIG_VERSION = "config.version"
DISPLAY_NAME = "displayName"
GUEST_OS = "guestOS"
HPET0_PRESENT = "hpet0.present"
MEMORY_MAX_SIZE = "memory.maxsize"
MEMORY_SIZE = "memsize"
MKS_ENABLE_3D = "mks.enable3d"
NUM_VCPUS = "numvcpus"
NVRAM = "nvram"
