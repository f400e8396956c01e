"""Small helpers shared by the config layer and the code writer."""
