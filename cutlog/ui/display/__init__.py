# cutlog/ui/display/__init__.py
# Display renderers for command results
