#!/usr/bin/env python3
"""
Launch file for the OpenROV teleop node.
"""
from launch import LaunchDescription
from launch_ros.actions import Node
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration


def generate_launch_description():
    config_file_arg = DeclareLaunchArgument(
        'config_file',
        default_value='',
        description='Teleop YAML file name (overrides the individual arguments below)'
    )

    x_gain_arg = DeclareLaunchArgument(
        'x_gain',
        default_value='4.0',
        description='Surge force per unit stick deflection [N]'
    )

    z_gain_arg = DeclareLaunchArgument(
        'z_gain',
        default_value='3.0',
        description='Heave force per unit stick deflection [N]'
    )

    yaw_gain_arg = DeclareLaunchArgument(
        'yaw_gain',
        default_value='0.3',
        description='Yaw torque per unit stick deflection [N⋅m]'
    )

    thruster_offset_arg = DeclareLaunchArgument(
        'thruster_offset',
        default_value='0.045',
        description='Port/stbd thruster distance from centre line [m]'
    )

    publish_period_arg = DeclareLaunchArgument(
        'publish_period',
        default_value='0.2',
        description='Motor command publish period [s]'
    )

    joy_node = Node(
        package='joy',
        executable='joy_node',
        name='joy',
        output='screen',
    )

    teleop_node = Node(
        package='openrov_teleop',
        executable='openrov_teleop_node',
        name='openrov_teleop',
        output='screen',
        parameters=[{
            'config_file': LaunchConfiguration('config_file'),
            'x_gain': LaunchConfiguration('x_gain'),
            'z_gain': LaunchConfiguration('z_gain'),
            'yaw_gain': LaunchConfiguration('yaw_gain'),
            'thruster_offset': LaunchConfiguration('thruster_offset'),
            'publish_period': LaunchConfiguration('publish_period'),
        }]
    )

    return LaunchDescription([
        config_file_arg,
        x_gain_arg,
        z_gain_arg,
        yaw_gain_arg,
        thruster_offset_arg,
        publish_period_arg,
        joy_node,
        teleop_node,
    ])
