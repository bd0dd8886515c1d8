"""
Guest operating system identifiers accepted by vmcli.

Pass one of these as the guest type when creating a virtual machine, for
example ``client.vm.create(directory, "build-01", guest_os_types.UBUNTU_LINUX_64)``.
Identifiers ending in ``-64`` are the 64-bit (x86_64) variants.
"""

# DOS and Windows
DOS = "dos"
WINDOWS_3_1 = "win31"
WINDOWS_95 = "win95"
WINDOWS_98 = "win98"
WINDOWS_ME = "winme"
WINDOWS_NT = "winnt"
WINDOWS_2000_PROFESSIONAL = "win2000pro"
WINDOWS_2000_SERVER = "win2000serv"
WINDOWS_2000_ADVANCEDSERVER = "win2000advserv"
WINDOWS_XP_HOME = "winxphome"
WINDOWS_XP_PROFESSIONAL = "winxppro"
WINDOWS_XP_PROFESSIONAL_64 = "winxppro-64"
WINDOWS_SERVER_2003_WEB_EDITION = "winnetweb"
WINDOWS_SERVER_2003_STANDARD_EDITION = "winnetstandard"
WINDOWS_SERVER_2003_ENTERPRISE_EDITION = "winnetenterprise"
WINDOWS_SERVER_2003_DATACENTER_EDITION = "winnetdatacenter"
WINDOWS_SERVER_SMALL_BUSINESS_SERVER_2003 = "winnetbusiness"
WINDOWS_SERVER_2003_STANDARD_EDITION_64 = "winnetstandard-64"
WINDOWS_SERVER_2003_ENTERPRISE_EDITION_64 = "winnetenterprise-64"
WINDOWS_SERVER_2003_DATACENTER_EDITION_64 = "winnetdatacenter-64"
WINDOWS_SERVER_2008 = "longhorn"
WINDOWS_SERVER_2008_64 = "longhorn-64"
WINDOWS_VISTA = "winvista"
WINDOWS_VISTA_64 = "winvista-64"
WINDOWS_7 = "windows7"
WINDOWS_7_64 = "windows7-64"
WINDOWS_SERVER_2008_R2_64 = "windows7srv-64"
WINDOWS_8 = "windows8"
WINDOWS_8_64 = "windows8-64"
WINDOWS_SERVER_2012_SERVER_64 = "windows8srv-64"
WINDOWS_10 = "windows9"
WINDOWS_10_64 = "windows9-64"
WINDOWS_HYPERV = "winhyperv"
WINDOWS_SERVER_2016 = "windows9srv-64"
WINDOWS_SERVER_2019 = "windows2019srv-64"
WINDOWS_SERVER_2022 = "windows2019srvnext-64"
WINDOWS_SERVER_2025 = "windows2022srvnext-64"

# FreeBSD
FREEBSD = "freebsd"
FREEBSD11 = "freebsd11"
FREEBSD12 = "freebsd12"
FREEBSD13 = "freebsd13"
FREEBSD_64 = "freebsd-64"
FREEBSD11_64 = "freebsd11-64"
FREEBSD12_64 = "freebsd12-64"
FREEBSD13_64 = "freebsd13-64"

# Linux
REDHATLINUX21 = "redhat"
RHEL2 = "rhel2"
RHEL3 = "rhel3"
RHEL4 = "rhel4"
RHEL5 = "rhel5"
RHEL6 = "rhel6"
RHEL7 = "rhel7"
RHEL3_64 = "rhel3-64"
RHEL4_64 = "rhel4-64"
RHEL5_64 = "rhel5-64"
RHEL6_64 = "rhel6-64"
RHEL7_64 = "rhel7-64"
RHEL8_64 = "rhel8-64"
RHEL9_64 = "rhel9-64"
FEDORA = "fedora"
FEDORA_64 = "fedora-64"
CENTOS = "centos"
CENTOS_6 = "centos6"
CENTOS_7 = "centos7"
CENTOS_64 = "centos-64"
CENTOS_6_64 = "centos6-64"
CENTOS_7_64 = "centos7-64"
CENTOS_8_64 = "centos8-64"
CENTOS_9_64 = "centos9-64"
ORACLELINUX = "oraclelinux"
ORACLELINUX_6 = "oraclelinux6"
ORACLELINUX_7 = "oraclelinux7"
ORACLELINUX_64 = "oraclelinux-64"
ORACLELINUX_6_64 = "oraclelinux6-64"
ORACLELINUX_7_64 = "oraclelinux7-64"
ORACLELINUX_8_64 = "oraclelinux8-64"
ORACLELINUX_9_64 = "oraclelinux9-64"
SUSELINUX = "suse"
SUSELINUX_64 = "suse-64"
OPENSUSE = "opensuse"
OPENSUSE_64 = "opensuse-64"
SLES = "sles"
SLES_10 = "sles10"
SLES_11 = "sles11"
SLES_12 = "sles12"
SLES_64 = "sles-64"
SLES_10_64 = "sles10-64"
SLES_11_64 = "sles11-64"
SLES_12_64 = "sles12-64"
SLES_15_64 = "sles15-64"
SLES_16_64 = "sles16-64"
NOVELL_LINUX_DESKTOP_9 = "nld9"
SUN_JAVA_DESKTOP_SYSTEM = "sjds"
MANDRAKE_LINUX = "mandrake"
MANDRIVA_LINUX = "mandriva"
MANDRIVA_LINUX_64 = "mandriva-64"
TURBO_LINUX = "turbolinux"
TURBO_LINUX_64 = "turbolinux-64"
UBUNTU_LINUX = "ubuntu"
UBUNTU_LINUX_64 = "ubuntu-64"
DEBIAN_GNU_LINUX_4 = "debian4"
DEBIAN_GNU_LINUX_5 = "debian5"
DEBIAN_GNU_LINUX_6 = "debian6"
DEBIAN_GNU_LINUX_7 = "debian7"
DEBIAN_GNU_LINUX_8 = "debian8"
DEBIAN_GNU_LINUX_9 = "debian9"
DEBIAN_GNU_LINUX_10 = "debian10"
DEBIAN_GNU_LINUX_11 = "debian11"
DEBIAN_GNU_LINUX_4_64 = "debian4-64"
DEBIAN_GNU_LINUX_5_64 = "debian5-64"
DEBIAN_GNU_LINUX_6_64 = "debian6-64"
DEBIAN_GNU_LINUX_7_64 = "debian7-64"
DEBIAN_GNU_LINUX_8_64 = "debian8-64"
DEBIAN_GNU_LINUX_9_64 = "debian9-64"
DEBIAN_GNU_LINUX_10_64 = "debian10-64"
DEBIAN_GNU_LINUX_11_64 = "debian11-64"
ASIANUX_3 = "asianux3"
ASIANUX_4 = "asianux4"
ALMALINUX_64 = "almalinux-64"
ASIANUX_3_64 = "asianux3-64"
ASIANUX_4_64 = "asianux4-64"
ASIANUX_5_64 = "asianux5-64"
ASIANUX_6_64 = "asianux6-64"
ASIANUX_7_64 = "asianux7-64"
ASIANUX_8_64 = "asianux8-64"
ASIANUX_9_64 = "asianux9-64"
AMAZONLINUX2_64 = "amazonlinux2-64"
AMAZONLINUX3_64 = "amazonlinux3-64"
VMWARE_PHOTON_64 = "vmware-photon-64"
GENERIC_LINUX = "genericlinux"
OTHER_LINUX = "otherlinux"
OTHER_24X_LINUX = "other24xlinux"
OTHER_26X_LINUX = "other26xlinux"
OTHER_3X_LINUX = "other3xlinux"
OTHER_4X_LINUX = "other4xlinux"
OTHER_5X_LINUX = "other5xlinux"
OTHER_LINUX_64 = "otherlinux-64"
OTHER_24X_LINUX_64 = "other24xlinux-64"
OTHER_26X_LINUX_64 = "other26xlinux-64"
OTHER_3X_LINUX_64 = "other3xlinux-64"
OTHER_4X_LINUX_64 = "other4xlinux-64"
OTHER_5X_LINUX_64 = "other5xlinux-64"

# Solaris and other Unix-like systems
SOLARIS_6 = "solaris6"
SOLARIS_7 = "solaris7"
SOLARIS_8 = "solaris8"
SOLARIS_9 = "solaris9"
SOLARIS_10 = "solaris10"
SOLARIS_11 = "solaris11"
SOLARIS_10_64 = "solaris10-64"
SOLARIS_11_64 = "solaris11-64"
OS_2 = "os2"
ECOMSTATION = "ecomstation"
ECOMSTATION2 = "ecomstation2"
NOVELL_NETWARE_4 = "netware4"
NOVELL_NETWARE_5 = "netware5"
NOVELL_NETWARE_6 = "netware6"
SCO_OPENSERVER_5 = "openserver5"
SCO_OPENSERVER_6 = "openserver6"
SCO_UNIXWARE_7 = "unixware7"

# macOS
MACOS_10_5 = "darwin"
MACOS_10_6 = "darwin10"
MACOS_11 = "darwin11"
MACOS_10_5_64 = "darwin-64"
MACOS_10_6_64 = "darwin10-64"
MACOS_11_64 = "darwin11-64"
MACOS_12_64 = "darwin12-64"
MACOS_13_64 = "darwin13-64"
MACOS_14_64 = "darwin14-64"
MACOS_15_64 = "darwin15-64"
MACOS_16_64 = "darwin16-64"
MACOS_17_64 = "darwin17-64"
MACOS_18_64 = "darwin18-64"
MACOS_19_64 = "darwin19-64"
MACOS_20_64 = "darwin20-64"
MACOS_21_64 = "darwin21-64"

# VMware ESX
VMWARE_ESX_4 = "vmkernel"
VMWARE_ESX_5 = "vmkernel5"
VMWARE_ESX_6 = "vmkernel6"
VMWARE_ESX_6_5 = "vmkernel65"
VMWARE_ESX_7 = "vmkernel7"

# Other
OTHER = "other"
OTHER_64 = "other-64"
