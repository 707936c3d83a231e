"""Core building blocks shared by the consumer and the publisher."""
