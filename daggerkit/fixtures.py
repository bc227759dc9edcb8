"""Default values shared across the package: cache paths, images and mount points."""

GO_CACHE_MOD_PATH_DEFAULT = "/go/pkg/mod"
GO_CACHE_BUILD_PATH_DEFAULT = "/go/build-cache"

IMAGE_VERSION = "latest"
IMAGE = "alpine"

MNT_PREFIX = "/mnt"