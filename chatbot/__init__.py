# Chatbot package: conversation controller, local responder and the
# provider gateway served by chatbot.app.
