"""
UI labels for the segment composer.
"""

SAVE_CHANGES = "Save segment"
SAVING_SEGMENT = "Saving Segment"
ENTER_SEGMENT = "Enter the Name of the Segment"
SEGMENT_NAME_PLACEHOLDER = "Name of the segment"
SAVE_SEGMENT = "To save your segment, you need to add the schemas to build the query"
ADD_SCHEMA_SEGMENT = "Add schema to segment"
ADD_NEW_SCHEMA = "+ Add new schema"
SAVE_THE_SEGMENT = "Save the Segment"
CANCEL = "Cancel"

# Widget keys
OPEN_BUTTON_KEY = "open_composer"
NAME_WIDGET_KEY = "segment_name_input"
PENDING_WIDGET_KEY = "pending_schema"
ADD_BUTTON_KEY = "add_schema"
SUBMIT_BUTTON_KEY = "submit_segment"
CANCEL_BUTTON_KEY = "cancel_segment"
REMOVE_BUTTON_PREFIX = "remove_schema_"
