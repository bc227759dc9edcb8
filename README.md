# daggerkit

Small helpers for writing container build pipelines in Python. They build
command lines, environment variables, image references, install scripts and
`apko build` argument lists, and they check YAML files, keyrings and working
directories before anything runs.

## Installation

```
pip install daggerkit
```

To run the test suite:

```
pip install "daggerkit[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `daggerkit.cmdx` | Build argument lists and `sh -c` commands; build `curl` command lines |
| `daggerkit.envvars` | Turn `KEY=value` strings, lists and dicts into `DaggerEnvVars` |
| `daggerkit.models` | Data classes `DaggerEnvVars`, `CacheFns` and `ContainerCommand` |
| `daggerkit.containerx` | Default image names and versions; image reference validation |
| `daggerkit.filex` | Check YAML files for extension, existence, content and syntax |
| `daggerkit.installerx` | Shell scripts that install the AWS CLI, Terraform, OpenTofu, Terragrunt or a GitHub release asset |
| `daggerkit.githubx` | Look up the latest release tag of a GitHub repository |
| `daggerkit.apkox.builder` | Fluent `ApkoBuilder` producing `apko build` argument lists |
| `daggerkit.apkox.keyring` | Parse and validate apk keyring entries |
| `daggerkit.workdir` | Default and validated working directories under `/mnt` |
| `daggerkit.logger` | A standard-library logger configured from `LOG_LEVEL` and `LOG_FORMAT` |
| `daggerkit.fixtures` | Default values: the `alpine` image, the `/mnt` mount prefix, cache paths |
| `daggerkit.cleaner`, `daggerkit.merger`, `daggerkit.parser` | Small string, list and type-check utilities |

Invalid input raises `ValueError` with a message that says what is wrong.

## Examples

### Commands

```python
from daggerkit.cmdx import build_args, generate_command, generate_sh_command

build_args("plan", "-var 'foo=bar'", "apply --auto-approve")
# ['plan', '-var', "'foo=bar'", 'apply', '--auto-approve']

generate_command("terraform", "apply --auto-approve")
# ['terraform', 'apply', '--auto-approve']

generate_sh_command("echo", "Hello, World!")
# 'sh -c "echo Hello, World!"'
```

### Environment variables

```python
from daggerkit.envvars import to_dagger_env_vars_from_str

to_dagger_env_vars_from_str("FOO=bar,BAZ=qux")
# [DaggerEnvVars(name='FOO', value='bar', expand=False),
#  DaggerEnvVars(name='BAZ', value='qux', expand=False)]
```

### Image references

```python
from daggerkit.containerx import BaseContainerOpts, get_image_url, validate_image_url

get_image_url(BaseContainerOpts(image="ubuntu", version="20.04"))  # 'ubuntu:20.04'
get_image_url(BaseContainerOpts())                                 # 'alpine:latest'
validate_image_url("ghcr.io/username/repo:tag")                    # True
validate_image_url("registry/repo:invalid_tag!")                   # raises ValueError
```

### Install scripts

```python
from daggerkit.installerx import TerraformInstallParams, get_terraform_install_command

print(get_terraform_install_command(TerraformInstallParams(version="1.0.0")))
```

### apko builds

```python
from daggerkit.apkox.builder import ApkoBuilder

cmd = (
    ApkoBuilder()
    .with_config_file("config.yaml")
    .with_output_image("my-image")
    .with_tag("v1.0.0")
    .with_output_tarball("output.tar")
    .with_key_ring_wolfi()
    .build_command()
)
# ['apko', 'build', '--keyring-append', '/etc/apk/keys/wolfi-signing.rsa.pub',
#  '--sbom=false', '--vcs=false', 'config.yaml', 'my-image:v1.0.0', 'output.tar']
```

### Keyrings

```python
from daggerkit.apkox.keyring import parse_keyring, is_keyring_format_valid

parse_keyring("/etc/apk/keys/foo=https://example.com/key.pub")
# KeyringSkeleton(path='/etc/apk/keys/foo', url='https://example.com/key.pub')
is_keyring_format_valid(["https://example.com/key.pub"], True)  # passes silently
```

## What it does not do

The package only produces commands, scripts and settings; it never runs them.
It does not start containers, connect to a container engine or execute the
install scripts it generates. Apart from `githubx`, which makes one HTTPS
request to read a release tag, it does no network access.