"""Names of the environment variables that configure the secure root lookup."""

ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME = "ROS_SECURITY_ROOT_DIRECTORY"
ROS_SECURITY_NODE_DIRECTORY_VAR_NAME = "ROS_SECURITY_NODE_DIRECTORY"
ROS_SECURITY_LOOKUP_TYPE_VAR_NAME = "ROS_SECURITY_LOOKUP_TYPE"
ROS_SECURITY_ENABLE_VAR_NAME = "ROS_SECURITY_ENABLE"
ROS_SECURITY_STRATEGY_VAR_NAME = "ROS_SECURITY_STRATEGY"

RESOLVER_VAR_NAMES = (
    ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME,
    ROS_SECURITY_NODE_DIRECTORY_VAR_NAME,
    ROS_SECURITY_LOOKUP_TYPE_VAR_NAME,
)
