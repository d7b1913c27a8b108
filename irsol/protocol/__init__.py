"""Messages, binary payloads, line parser and wire serializer of the irsol text protocol."""