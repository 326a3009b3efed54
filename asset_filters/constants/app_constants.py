class AppConstants:
    # column catalog
    CUSTOM_FIELD_PREFIX = 'cf_'
    NAME = 'name'
    VISIBLE = 'visible'
    POSITION = 'position'
    CF_TYPE = 'cfType'
    OPTIONS = 'options'
    KIND = 'kind'
    KIND_BUILTIN = 'builtin'
    KIND_CUSTOM = 'custom'

    # custom field definitions
    TYPE = 'type'
    REQUIRED = 'required'
    ACTIVE = 'active'

    # wire format: key=operator:value[,value]
    OPERATOR_DELIMITER = ':'
    RANGE_DELIMITER = ','
    DEFAULT_SORT_PARAM = 's'
    TRUE = 'true'
    FALSE = 'false'

    # defaults
    DATE_FORMAT = '%Y-%m-%d'
    DEFAULT_TIMEZONE = 'UTC'
