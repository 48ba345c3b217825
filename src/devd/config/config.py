import os
import platform

from configobj import ConfigObj, ConfigObjError, Section
from configobj.validate import Validator

from devd.connector.socketconn import DEVD_PIPE
from devd.protocol.reassembly import DEFAULT_CAPACITY

# The default extension for configuration files
config_extension = '.cfg'

# The name of the client configuration
client_config_name = 'devd'

# The directory holding the shipped configuration and schema
package_config_directory = os.path.dirname(os.path.abspath(__file__))


class ClientSettings:
    """
    The settings used to build a DevdClient.
    """
    def __init__(self, socket_path=DEVD_PIPE, buffer_capacity=DEFAULT_CAPACITY, connect_timeout=5.0):
        self.socket_path = socket_path
        self.buffer_capacity = buffer_capacity
        self.connect_timeout = connect_timeout


def config_flavor(name, flavor=None):
    configname = name if not flavor else name + '.' + flavor
    return configname


def config_filename(name, directory=None):
    """
    Determines the location of a config file in the given directory.
    """
    return os.path.join(directory or package_config_directory, name + config_extension)


def load_config_file_base(file, must_exist=True):
    """
    Loads a configuration file
    :param file:        The configuration file to load
    :param must_exist:  when True, the file must exist or an exception is thrown.
    :return: The ConfigObj instance for the file.
    """
    try:
        return ConfigObj(file, interpolation='Template', file_error=must_exist) \
            if must_exist or os.path.exists(file) else ConfigObj()
    except ConfigObjError as e:
        raise type(e)(str(e) + ' at ' + file)


def config_flavor_file(name, directory, subpart=None) -> ConfigObj:
    """
    Loads a specialization of a config file. The configuration file is expected to be named
    after the base, followed by a period and then the specialization, if the specialization is given,
    otherwise just the base name.
    :param name:    The name of the base configuration
    :param subpart: The name of the specialization.
    :return: The ConfigObj for the configuration file, empty if the file doesn't exist.
    """
    configname = config_flavor(name, subpart)
    file = config_filename(configname, directory)
    return load_config_file_base(file, False)


def map_os_name(name):
    """
    >>> map_os_name('FreeBSD')
    'freebsd'
    >>> map_os_name("Darwin")
    'osx'
    """
    name = name.lower()
    if name == 'darwin':
        name = 'osx'
    return name


def os_name():
    return map_os_name(platform.system())


def load_config(name, directory, schema_directory=None):
    """
        Loads all the configuration files that relate to the given name.
        Later files override earlier ones:
        - the default specialization
        - the platform specialization
        - the user override (~/<name>.cfg)
        - the base configuration
        The configurations are flattened into a single configuration, and then validated
        against the "schema" specialization, which also supplies defaults and converts the values.
    :param directory: the location of the configuration files
    :param schema_directory: the location of the schema, by default the same as directory
    :return: the validated ConfigObj
    """
    schema_file = config_filename(config_flavor(name, 'schema'), schema_directory or directory)
    try:
        config = ConfigObj(configspec=schema_file)
    except (IOError, ConfigObjError) as e:
        raise ConfigObjError("unable to read the schema for %s: %s" % (name, e)) from e
    config.merge(config_flavor_file(name, directory, 'default'))
    config.merge(config_flavor_file(name, directory, os_name()))
    config.merge(load_config_file_base(os.path.expanduser('~/' + name + config_extension), must_exist=False))
    config.merge(config_flavor_file(name, directory))

    result = config.validate(Validator())
    if result is not True:
        raise ConfigObjError("the config file %s failed validation %s" % (name, result))
    return config


def apply_conf(conf: Section, target):
    """
    Applies the attributes contained in a configuration object to a target object.
    It does this by iterating over the items in the configuration and setting any attributes with the same name.
    """
    for k, v in conf.items():
        if hasattr(target, k):
            setattr(target, k, v)


def load_client_settings(directory=None, name=client_config_name) -> ClientSettings:
    """
    Loads the client settings. The schema always comes from the package, the
    configuration files from directory, or the package if not given.
    """
    conf = load_config(name, directory or package_config_directory, package_config_directory)
    settings = ClientSettings()
    apply_conf(conf, settings)
    return settings
