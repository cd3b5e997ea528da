import warnings

# Suppress botocore/boto3 deprecation chatter about the running interpreter.
# These clutter the CLI output.
warnings.filterwarnings("ignore", category=DeprecationWarning, module="botocore")
warnings.filterwarnings("ignore", category=DeprecationWarning, module="boto3")
