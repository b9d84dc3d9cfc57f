"""Default file templates.

Written into ~/.config/wtf/ on first run when no custom config
file is given on the command line.
"""

DEFAULT_CONFIG_TEMPLATE = """\
# wtf configuration
# Module reference: https://wtfutil.com/modules/

wtf:
  colors:
    border:
      focusable: darkslateblue
      focused: orange
      normal: gray
  grid:
    columns: [32, 32, 32, 32, 90]
    rows: [10, 10, 10, 4, 4, 90]
  refreshInterval: 1
  mods:
    clocks_a:
      colors:
        rows:
          even: "lightblue"
          odd: "white"
      enabled: true
      locations:
        Vancouver: "America/Vancouver"
        Toronto: "America/Toronto"
      position:
        top: 0
        left: 1
        height: 1
        width: 1
      refreshInterval: 15
      sort: "alphabetical"
      title: "Clocks A"
      type: "clocks"
    security_info:
      colors:
        rows:
          even: "lightblue"
          odd: "white"
      enabled: true
      position:
        top: 1
        left: 2
        height: 1
        width: 1
      refreshInterval: 3600
      type: "security"
    uptime:
      args: [""]
      cmd: "uptime"
      enabled: true
      position:
        top: 3
        left: 1
        height: 1
        width: 2
      refreshInterval: 30
      type: "cmdrunner"
"""

DEFAULT_SECRETS_TEMPLATE = """\
# wtf secrets
#
# Keep API keys and other sensitive values here instead of in config.yml.
# This file is readable by its owner only.
#
# Example:
#
# github:
#   apiKey: "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx"
"""
