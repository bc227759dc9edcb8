"""Building apko command lines and handling apk keyrings."""