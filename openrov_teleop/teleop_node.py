import os

import rclpy
from rclpy.node import Node
from sensor_msgs.msg import Joy
from std_msgs.msg import Float32, Int32, Int32MultiArray
from ament_index_python.packages import PackageNotFoundError, get_package_share_directory

from openrov_teleop.allocation_pipeline import AllocationPipeline
from openrov_teleop.config import PARAMETER_NAMES, TeleopConfig, load_config_from_yaml
from openrov_teleop.input_mapper import JoystickSample


class TeleopNode(Node):
    def __init__(self):
        super().__init__('openrov_teleop')

        # Declare parameters (defaults match TeleopConfig)
        defaults = TeleopConfig().as_dict()
        self.declare_parameter('config_file', '')
        for param_name, field in PARAMETER_NAMES.items():
            self.declare_parameter(param_name, defaults[field])

        self.config = self._load_config()
        self.get_logger().info(f"Teleop configuration: {self.config}")

        self.pipeline = AllocationPipeline(self.config, logger=self.get_logger())

        # OpenROV topics; no camera servo publisher since camera tilt is not implemented
        self.motor_pub = self.create_publisher(Int32MultiArray, '/openrov/motortarget', 1)
        self.light_pub = self.create_publisher(Float32, '/openrov/light_command', 1)
        self.laser_pub = self.create_publisher(Int32, '/openrov/laser_toggle', 1)

        self.create_subscription(Joy, 'joy', self.joy_callback, 10)

        # joy publishes at 100-200 Hz, too fast for the OpenROV serial link,
        # so motor commands go out on a slower timer
        self.timer = self.create_timer(self.config.publish_period, self.timer_callback)

    def _load_config(self) -> TeleopConfig:
        """Config from a YAML file if ``config_file`` is set, else from ROS parameters."""
        config_file = self.get_parameter('config_file').get_parameter_value().string_value
        if config_file:
            if not os.path.isabs(config_file):
                try:
                    pkg_dir = get_package_share_directory('openrov_teleop')
                    config_file = os.path.join(pkg_dir, 'config', config_file)
                except PackageNotFoundError:
                    config_file = os.path.join(
                        os.path.dirname(__file__), '..', 'config', config_file
                    )
            self.get_logger().info(f"Loading teleop configuration from: {config_file}")
            return load_config_from_yaml(config_file)

        return TeleopConfig.from_parameters({
            name: self.get_parameter(name).value for name in PARAMETER_NAMES
        })

    def joy_callback(self, msg: Joy):
        """Run the pipeline on a joystick event and publish auxiliary changes."""
        sample = JoystickSample.capture(msg.axes, msg.buttons)
        result = self.pipeline.process(sample)
        if result is None:
            return

        if result.light is not None:
            self.light_pub.publish(Float32(data=result.light))
        if result.laser is not None:
            self.laser_pub.publish(Int32(data=result.laser))

    def timer_callback(self):
        """Re-publish the latest motor command [port, vert, stbd]."""
        command = self.pipeline.latest_command()
        self.motor_pub.publish(Int32MultiArray(data=list(command)))


def main(args=None):
    rclpy.init(args=args)
    node = TeleopNode()
    rclpy.spin(node)
    node.destroy_node()
    rclpy.shutdown()


if __name__ == '__main__':
    main()
